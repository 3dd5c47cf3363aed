"""HTTP API for Rehearsal.

Run with:

    uvicorn rehearsal.api.app:app
"""
