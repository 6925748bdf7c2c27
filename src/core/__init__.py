"""Core: configuración, logging, contratos y errores del mapper.

No depende de httpx ni de asyncio; los adaptadores dependen de él.
"""
