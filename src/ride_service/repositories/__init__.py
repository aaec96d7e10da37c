"""
Слой доступа к данным.
Каждый репозиторий инкапсулирует запросы к одной таблице.
"""
