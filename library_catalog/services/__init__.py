"""Library Catalog - Services Package

This package contains the operations that act on the record store:
- Catalog service (adding, listing and searching books)
- Membership service (registering and listing users)
- Transaction service (borrowing and returning books)
"""
