# ABOUTME: Interfaces package initialization
# ABOUTME: Abstract contracts for middleware, dispatchers and path matchers
