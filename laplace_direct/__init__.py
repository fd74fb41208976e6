"""Direct sparse solution of the 3D Laplace equation on a regular grid."""

__version__ = "0.1.0"