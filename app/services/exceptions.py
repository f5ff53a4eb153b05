class TiendaNotFoundError(LookupError):
    """Raised when a tienda id does not match any row."""

    def __init__(self, tienda_id: int):
        self.tienda_id = tienda_id
        super().__init__(f"Tienda no encontrada con id: {tienda_id}")
