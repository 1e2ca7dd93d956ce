"""
ai-perf-scan host application: command-line interface, HTTP API and the
OpenAI-backed advisory service around the perf_scanner core.
"""
