"""
Medsite Backend — API Routes Package
=====================================

Route Inventory:
    - health.py:    GET  /                      (service banner)
                    GET  /health                (service health check)
    - admins.py:    POST /admin/admins          (create admin)
                    POST /admin/signin          (issue bearer token)
    - countries.py: GET  /countries[/{id}]      (public)
                    POST/PUT/DELETE /admin/countries[/{id}]   (token)
    - colleges.py:  GET  /colleges[/{id}]       (public)
                    POST/PUT/DELETE /admin/colleges[/{id}]    (token)
    - blogs.py:     GET  /blogs[/{id}]          (public)
                    POST/PUT/DELETE /admin/blogs[/{id}]       (token)
    - customers.py: POST /customers             (public lead intake)
                    GET  /admin/customers       (token)

Protected routes live on each module's `admin_router`, built with
`AdminRoute` so the bearer check runs before the body is read.

Routes stay thin: parse the request, call the service, wrap the result in
a response model. Errors propagate to the global handlers in main.py.
"""
