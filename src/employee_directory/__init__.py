"""Employee Directory package.

Server-rendered employee directory: a thin Flask controller layer on top of
service/repository layers backed by MySQL.
"""
