from medstock.demo.default_scenario import DEFAULT_SCENARIO_ID, seed_default_scenario

__all__ = ["DEFAULT_SCENARIO_ID", "seed_default_scenario"]
