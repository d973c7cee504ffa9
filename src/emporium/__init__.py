"""Emporium storefront: accounts, catalogue, carts, orders, wishlists and reviews."""
