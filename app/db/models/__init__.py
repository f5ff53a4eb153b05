from .tienda import Tienda
from .jabon import Jabon

__all__ = ['Tienda', 'Jabon']
