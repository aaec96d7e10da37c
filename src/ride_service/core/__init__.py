"""Инфраструктура приложения: конфигурация, база данных, логирование, ошибки."""
