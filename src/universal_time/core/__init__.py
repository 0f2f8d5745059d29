"""
Core domain models and numerical primitives.

Не зависит от внешних систем: только чистые функции и value objects.
"""
