"""Spots app: rentable listings, their images and the listing queries."""
