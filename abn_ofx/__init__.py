"""Convert ABN AMRO spreadsheet exports into OFX statements."""

__all__: list[str] = [
    "build_ofx",
    "etl",
    "normalize",
    "payee",
    "rules",
]
