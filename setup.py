import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="puzzlegraph",
    version="0.1.0",
    description="Lazy graph search and minimum cut algorithms for grid and graph puzzles.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=["puzzlegraph", "puzzlegraph.*"]),
    classifiers=[
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=[
        "frozendict>=2.3.8",
        "numpy>=1.24",
        "tqdm",
    ],
    extras_require={
        "test": [
            "pytest",
            "parameterized",
            "networkx",
        ],
    },
)
