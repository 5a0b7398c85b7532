# ABOUTME: Components package for reusable engine building blocks
