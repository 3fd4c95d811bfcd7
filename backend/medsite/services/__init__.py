# Services package init
"""
Medsite Backend — Services Layer
=================================

What:  Business rules between the routes (HTTP) and the Database gateway.
How:   Each resource service is a stateless singleton; routes pass in the
       request's Database handle. Rule violations surface as MedsiteError
       subclasses, which the app-level handlers map to status codes.

Service Inventory:
    - passwords: bcrypt hash/verify off the event loop
    - TokenService: HS256 session tokens carrying the admin identity
    - AdminService: admin creation and signin
    - CountryService / CollegeService / BlogService: resource CRUD
    - CustomerService: lead intake and listing
    - validation: shared required-field and minimum-length checks
"""
