"""
API Dependencies

Inyecta la conexión compartida a MongoDB en cada endpoint.
La conexión vive en app.state y se crea una única vez en create_app().
"""

from fastapi import Request

from hubsy.config.database import MongoConnection


def get_connection(request: Request) -> MongoConnection:
    return request.app.state.mongo
