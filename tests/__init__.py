# tests/__init__.py
"""
Test suite for the kotowaza catalog.

Organization:
- test_types / test_loader / test_index: record parsing, file loading, id index.
- test_catalog: every query operation over a small fixture dataset.
- test_cache / test_dataset: the shared catalog and the bundled data.
- test_config / test_logging_config: settings and structlog setup.
"""
