"""
Terminal dashboard for flexprice-cli.

- dashboard: Session state machine (tabs, items, detail)
- view: Rich rendering
- keys: Terminal key input and bindings
- app: Event loop
"""
