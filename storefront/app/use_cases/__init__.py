"""
Use Cases

Organized into domain folders:
- auth/: Registration, login and password flows
- users/: Profile and admin user management
- products/: Product catalog
- orders/: Checkout and fulfillment
- sales/: Sales reporting

Import from subdirectories.
"""
