"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, raw page requests
    └── {feature}.py      # Parsing, pagination, sampling

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with files above.  See ``gbif/``.

2. Issue requests through the retry wrapper so every source shares the
   same attempt budget and log lines::

       from species_heatmap.services.http import fetch_json_with_retry

       def search(params, *, subject, config) -> dict[str, Any]:
           return fetch_json_with_retry(
               API_URL,
               params,
               subject=subject,
               max_attempts=config.max_attempts,
               delay=config.retry_delay,
           )

3. Normalize records to ``schemas.Point`` before returning them.

4. Re-export public API in ``__init__.py`` with ``__all__``.

5. Add tests in ``tests/test_{name}.py``.
"""
