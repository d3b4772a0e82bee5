"""
auth — User authentication module.

Provides:
  • JWT token creation & verification
  • Password hashing (bcrypt)
  • Signup / Login use cases and API routes
"""
