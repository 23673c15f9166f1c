"""
Payroll Kernel

Shared foundation for the weekly payroll system:
- Typed exceptions with machine-readable codes
- Structured JSON logging with run-scoped context
"""

__version__ = "0.1.0"
