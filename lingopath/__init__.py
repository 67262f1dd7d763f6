"""
LingoPath - Leveled English curriculum for Vietnamese speakers.

Subpackages:
- schemas: Pydantic content models
- classroom: catalog, level index, query layer, learning path, placement quiz
- viewer: HTML rendering for the Streamlit app
- utils: YAML content loading
"""
