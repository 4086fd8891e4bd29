from src.blades.scenarios.sample_crew import create_sample_crew

__all__ = ['create_sample_crew']
