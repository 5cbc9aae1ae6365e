# This file marks the routers package for API route modules.
# It exists so import paths stay clear when registering route groups.
# Health checks and store-location queries live in separate modules.
