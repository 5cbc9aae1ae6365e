# This file marks the services package for API business logic modules.
# It exists so routers can depend on cohesive service classes instead of calling the core directly.
# Service modules isolate query execution and error translation from transport concerns.
# That separation makes API behavior easier to test and maintain.
