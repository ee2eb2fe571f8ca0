from devto_digest.pipeline.digest import DigestPipeline

__all__ = ["DigestPipeline"]
