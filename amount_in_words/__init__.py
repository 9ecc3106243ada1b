"""
Amount in Words — Indian-numbering currency words for printed invoices.

Architecture: Invoice → Grand Total (2 dp) → Converter → "… Rupees … Only"
Philosophy:  The converter only spells numbers. Symbols and layout belong to the caller.
"""

__version__ = "1.0.0"
