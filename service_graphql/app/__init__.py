"""
GraphQL gateway application package.

The gateway exposes one GraphQL endpoint over several backends:
- the in-process sample books and authors
- Azure DevOps service health
- GitHub repositories, through a delegated token taken from a cookie
- a downstream GraphQL books service, reached by forwarding sub-queries

Structure:
- app.main: FastAPI app, routes, and service wiring.
- app.adapters: one client per backend plus the process-wide registry.
- app.domain: request identity and sample records.
- app.schema: Strawberry types, resolvers, context and metrics extension.
- app.health: liveness prober behind /health.
"""
