"""
NxtHub Campaign Desk - influencer campaign tracking across departments.
"""
__version__ = "1.0.0"
