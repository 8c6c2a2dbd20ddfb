"""
Fitness Coach backend.

Calorie, diet and workout planners exposed as agent tools and over HTTP.
"""
