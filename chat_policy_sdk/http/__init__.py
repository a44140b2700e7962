"""HTTP API layer for the chat policy SDK.

This module provides FastAPI integration for the resolver:

    from fastapi import FastAPI
    from chat_policy_sdk.http.api import router

    app = FastAPI()
    app.include_router(router, prefix="/policy")
"""
