from hinject import initialize, inject

# Initialize a root Injector
injector = initialize()


class Greeting:
    def __init__(self):
        self.greeting = "inject"
        self.audience = 'inject(name="audience"):text'


@inject.bind(greeting=inject.reference("greeting_maker"))
class MessageBuilder:
    def __init__(self):
        self.injector = "inject"
        self.post_constructs = ["build"]

    def build(self):
        self.message = f"{self.greeting.greeting}, {self.greeting.audience}!"


injector.map("greeting").to_value("Bonjour")
injector.map("text", "audience").to_value("world")
injector.map("greeting_maker").to_type(Greeting)
injector.map("builder").to_singleton(MessageBuilder)

# Instantiate a class through the injector
builder = injector.get_instance("builder")
assert builder.message == "Bonjour, world!"
assert builder.injector is injector

# A child injector overrides a binding without touching its parent
child = injector.create_child_injector()
child.map("text", "audience").to_value("le monde")
greeting = Greeting()
child.inject_into(greeting)
assert greeting.audience == "le monde"

print(builder.message)
