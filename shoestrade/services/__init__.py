"""서비스 패키지 — 비즈니스 로직 계층.

Service package — Business logic layer.
Services run the read-then-throw validations, call repositories, and
translate empty repository results into domain errors.
"""
