"""
Shipping Rates v1.0.0

Estimates shipping rates for an order's package:
- Eligible shipping methods per destination address
- Cost per method via pluggable calculators
- Tax rate attachment per shipping tax category
- Default rate selection and presentation ordering
"""
__version__ = "1.0.0"
