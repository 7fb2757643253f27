from enum import Enum

from naega.domain.enums import TaskType

class TaskColor(Enum):
    RED = "[red]"
    BLUE = "[blue]"
    GREEN = "[green]"
    MAGENTA = "[magenta]"
    RESET = "[/]"

    def __str__(self):
        return self.value


TYPE_COLORS = {
    TaskType.TODO: TaskColor.BLUE,
    TaskType.DEADLINE: TaskColor.RED,
    TaskType.EVENT: TaskColor.MAGENTA,
}
