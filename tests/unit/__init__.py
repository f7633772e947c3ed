"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real I/O or wall-clock time; use FixedClock and fakes at boundaries.
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
