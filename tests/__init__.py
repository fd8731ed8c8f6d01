"""Test suite for easeloom.

Test Structure:
- unit/curves/: Curve catalog, combinators, families, synthesis and contextual curves
- unit/config/: Configuration models and loading
- unit/utils/: Math and logging helpers
- unit/cli/: Command-line interface
"""
