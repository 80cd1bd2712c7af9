"""Domain layer for eggledger application.

Services are imported from their own modules (``eggledger.domain.records``,
``eggledger.domain.export``) so that the database layer can import
``eggledger.domain.entities`` without pulling the services in.
"""
