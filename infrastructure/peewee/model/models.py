from peewee import AutoField, CharField, Database, DateTimeField, Model, TextField


class TaskModel(Model):
    id = AutoField()
    title = CharField(max_length=255)
    description = TextField(default="")
    status = CharField(max_length=50, default="pending", index=True)
    created_at = DateTimeField(index=True)
    updated_at = DateTimeField()

    class Meta:
        table_name = "tasks"


def bind_task_model(db: Database) -> type[TaskModel]:
    """Subclase de TaskModel enlazada a `db`; TaskModel queda sin tocar."""

    class BoundTaskModel(TaskModel):
        class Meta:
            database = db
            table_name = "tasks"

    return BoundTaskModel
