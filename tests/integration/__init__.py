"""Integration tests.

Purpose
- Exercise real interactions with the filesystem (TOML rule books).

Guidelines
- Use realistic configuration and setup/teardown per test or suite.
- Minimize mocking; write real files under tmp_path.
- Mark as 'integration' and keep them slower but reliable.
"""
