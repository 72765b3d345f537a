"""
Service layer.

Services hold the read‑modify‑write logic so the API handlers stay
thin and the store stays unaware of HTTP.
"""
