"""
Use Cases

Organized into domain folders:
- auth/: Login
- organizations/: Organization lifecycle
- clients/: Client lifecycle and search
- collections/: Collection lifecycle, queries and statistics
- users/: User management
"""
