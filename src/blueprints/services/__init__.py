from blueprints.services.blueprint_service import BlueprintService, build_service

__all__ = ["BlueprintService", "build_service"]
