"""HR portal package.

Feature modules (users, attendance, leaves, salaries, ...) each carry their own
model, repository, service and a thin Flask JSON controller; `container`
wires them together and `main.create_app` builds the application.
"""
