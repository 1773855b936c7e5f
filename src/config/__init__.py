"""Configuração do serviço (settings e logging)."""
