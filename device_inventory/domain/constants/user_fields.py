"""Constants for User model field names"""


class UserFields:
    """Field name constants for User documents"""
    ID = "id"
    USERNAME = "username"
    PASSWORD = "password"  # bcrypt hash, never the plain text
    ROLE = "role"
    EMAIL = "email"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
