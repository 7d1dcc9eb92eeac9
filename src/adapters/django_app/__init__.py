"""
Adapters Django.

DRIVING: API views (HTTP → Use Case)
DRIVEN: Repositories (Use Case → ORM)
"""
