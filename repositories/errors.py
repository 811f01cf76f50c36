class DuplicateEmailError(Exception):
    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"A user with the email '{email}' already exists.")


class EmployeeNotFoundError(Exception):
    def __init__(self, employee_id: str) -> None:
        self.employee_id = employee_id
        super().__init__(f"Employee '{employee_id}' does not exist.")
