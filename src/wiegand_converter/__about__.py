# wiegand_converter/__about__.py

APP_NAME        = "Wiegand Converter"
APP_TITLE       = "Wiegand 26-bit ⇆ Hex/Decimal/Facility+Card Converter"
AUTHOR          = "Wired Square"
COPYRIGHT_YEAR  = "2025"
COPYRIGHT       = f"© {COPYRIGHT_YEAR} {AUTHOR}"
HOMEPAGE        = "https://github.com/Wired-Square/wiegand-converter"


__version__ = "0.1.0"

__all__ = [
    "__version__",
    "APP_NAME", "APP_TITLE",
    "AUTHOR", "COPYRIGHT_YEAR", "COPYRIGHT", "HOMEPAGE",
]
