from agld.domain.bead.util.di.provider import BeadProvider

__all__ = ["BeadProvider"]
