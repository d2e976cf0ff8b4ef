from pydantic import BaseModel

from taskboard.utils.security import hash_password


def apply_updates(instance, update: BaseModel) -> None:
    """Copy the fields a client actually sent onto ``instance``.

    Omitted fields are untouched, and so are fields sent as ``None`` or
    ``""``. ``False`` counts as a value, so boolean flags can be switched
    off. A non-blank ``password`` is hashed into ``hashed_password``.
    """
    update_data = update.model_dump(exclude_unset=True)

    # Handle password update separately (hash it if provided)
    if 'password' in update_data:
        password = update_data.pop('password')
        if password:
            instance.hashed_password = hash_password(password)

    for field, value in update_data.items():
        if value is None or value == "":
            continue
        setattr(instance, field, value)
