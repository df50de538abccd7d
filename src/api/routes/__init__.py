"""
API Routes - one router per area

- config : configuration record, reorder, primary color
- export : snippet and document artifacts
- colors : notation parsing, preset palette
- system : event history, session reset
"""
