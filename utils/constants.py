"""
utils/constants.py

Purpose: Centralized static content

- User-facing response and error messages
- Seed data for reference tables

(Prevents hardcoding across the codebase)
"""

# ============================================================
# SELLER APPLICATIONS
# ============================================================

MSG_APPLICATION_SUBMITTED = "Seller application submitted successfully"
MSG_APPLICATION_RESUBMITTED = "Seller application resubmitted successfully"
ERR_DUPLICATE_APPLICATION = "You have already applied to become a seller"
ERR_USER_NOT_FOUND = "User not found."
ERR_SELLER_PROFILE_NOT_FOUND = "Seller profile not found."
ERR_REAPPLY_NOT_REJECTED = "Only rejected applications can be resubmitted"

# ============================================================
# PRODUCTS
# ============================================================

MSG_PRODUCT_ADDED = "Product added successfully"
ERR_SELLER_NOT_APPROVED = "Seller not approved"
ERR_UNKNOWN_CATEGORY = "Category does not exist"

# ============================================================
# ADMIN REVIEW
# ============================================================

MSG_SELLER_APPROVED = "Seller approved successfully"
MSG_SELLER_REJECTED = "Seller rejected successfully"
ERR_SELLER_NOT_FOUND = "Seller not found"
ERR_ADMIN_ONLY = "Admin access required"

# ============================================================
# AUTHENTICATION
# ============================================================

ERR_MISSING_TOKEN = "Missing bearer token"
ERR_INVALID_TOKEN = "Invalid or expired identity token"
ERR_UNREGISTERED_USER = "User is not registered"
ERR_IDENTITY_UNAVAILABLE = "Identity provider is unavailable"

# ============================================================
# STORE
# ============================================================

ERR_STORE = "A database error occurred. Please try again later."

# ============================================================
# SEED DATA
# ============================================================

DEFAULT_CATEGORIES = [
    "Electronics",
    "Fashion",
    "Home & Kitchen",
    "Beauty",
    "Books",
    "Sports",
    "Toys",
    "Grocery",
]

ADMIN_FIREBASE_UID = "admin-test-uid-123"
ADMIN_EMAIL = "admin@test.com"
ADMIN_NAME = "Test Admin"
