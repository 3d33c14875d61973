# ============================================================================
# SCOPE: APPLICATION LAYER (Scheduling)
# Description: Ports, DTOs, use cases and application services.
# ============================================================================
