"""
Job Application Dashboard client.

Core components:
- components: ProfileManager, JobDiscoveryClient, ApplicationCoordinator, ApplicationCache
- api: HTTP client for the dashboard backend
- workflow: Dashboard controller wiring the components together
"""
