"""SHELFWISE test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Real interactions with the filesystem (rule files, bootstrap).
- e2e/          : The `shelfwise` CLI driven through Click's CliRunner.

General guidance
- Keep unit fast and deterministic; freeze the date with FixedClock.
- Integration writes real files under pytest's tmp_path.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
