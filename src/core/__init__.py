"""Core: dominio, contratos y servicios puros (sin I/O)."""
