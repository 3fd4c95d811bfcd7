"""
Medsite Backend — Table Declarations
=====================================

Importing this package registers every table on `Base.metadata`, which
`Database.create_all()` and the test fixtures build the schema from.
"""

from medsite.models.admin import Admin
from medsite.models.blog import Blog
from medsite.models.college import College
from medsite.models.country import Country
from medsite.models.customer import Customer

__all__ = ["Admin", "Blog", "College", "Country", "Customer"]
