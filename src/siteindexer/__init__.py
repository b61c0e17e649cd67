"""Site Indexer - build a client-side search index for generated HTML sites."""

__version__ = "0.1.0"
