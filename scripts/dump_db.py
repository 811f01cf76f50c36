from app import create_app

app = create_app()

print('#### Users ####')
for credential in app.container.user_repo().get_all():
    print(f'{credential.user.id}')
    print(f'    email: {credential.user.email}')
    print(f'    name: {credential.user.name}')
    print(f'    role: {credential.user.role.value}')
    print('')

print('#### Employees ####')
for employee in app.container.employee_repo().get_all():
    print(f'{employee.id}')

    for k, v in vars(employee).items():
        if k != 'id':
            print(f'    {k}: {v}')
    print('')
