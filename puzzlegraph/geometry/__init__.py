from .direction import Direction
from .grid import Grid
from .point import Point
