"""
Boids flocking simulation with predators and poor-quality areas.
"""
