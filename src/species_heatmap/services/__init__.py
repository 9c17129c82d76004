"""
Shared utilities used by every datasource.

- http.py  - requests session and the fixed-delay retry wrapper
- log.py   - Prefect run logger with a plain logger fallback
"""
