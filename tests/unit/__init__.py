"""Unit tests.

Purpose
- Verify a single module/class/function in isolation, internals included
  (records, invariant checks, configuration parsing).

Guidelines
- Keep tests small, fast, and deterministic.
- Use `monkeypatch` for environment variables.
"""
