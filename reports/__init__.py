"""
reports — incident report submission and listing.
"""
