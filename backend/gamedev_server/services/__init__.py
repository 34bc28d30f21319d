"""Resource services: news posts, high scores and post ID allocation.

Services take their record store explicitly and raise the exceptions in
``gamedev_server.errors``; HTTP concerns stay in ``gamedev_server.api``.
"""
from gamedev_server.services.ids import SequentialIDAllocator
from gamedev_server.services.news import NewsService
from gamedev_server.services.scores import ScoreService

__all__ = ['SequentialIDAllocator', 'NewsService', 'ScoreService']
