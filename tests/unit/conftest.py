"""
Unit test fixtures. Use fakes and mocks; no real network or LLM.
"""
