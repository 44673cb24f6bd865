"""
Use Cases

Organized by domain folder:
- access/: tenant access checks
- tenants/: tenant lifecycle
- users/: tenant membership
- roles/: role listing and assignment
- groups/: groups and group membership
- shared_services/: shared services and group role grants
- tenant_requests/: tenant request approval workflow
"""
