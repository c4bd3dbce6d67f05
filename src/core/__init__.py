"""Core: domínio, contratos e serviços puros (sem I/O)."""
