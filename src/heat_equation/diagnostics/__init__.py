from .compare import MaterialRun, compare_materials, profile_table, run_material

__all__ = ["MaterialRun", "compare_materials", "profile_table", "run_material"]
