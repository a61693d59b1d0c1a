from typing import Any, Dict, List, Optional
from pydantic import BaseModel

class Assignment(BaseModel):
    """One variable binding from a satisfying solution."""
    name: str
    value: Any

    def as_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "value": self.value}

# None means the problem is unsatisfiable
Solution = Optional[List[Assignment]]

def solution_to_jsonable(solution: Solution) -> Optional[List[Dict[str, Any]]]:
    """Converts a solution into plain lists and dicts for json.dumps."""
    if solution is None:
        return None
    return [a.as_dict() for a in solution]
