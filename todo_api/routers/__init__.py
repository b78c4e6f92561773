"""
FastAPI routers grouped by domain.

Each module exposes an APIRouter that the application factory includes, which
keeps endpoint definitions close to the use cases they call.
"""
