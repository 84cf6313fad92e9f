import random

from .app import ZooApp
from .zoo import Zoo, clean_name

DEFAULT_ZOO_NAME = "My Zoo"


def show_delegation_intro():
    print("\nA delegation from the super-Earth TOI-1452 b has arrived at your zoo!")
    print("They are upset that there are no marine species here.")
    print("They kindly offer to send you their most interesting sea creatures,")
    print("if you can give them proper conditions!")
    print("Remember: marine animals need an enclosure of the 'Marine' type.")


def main():
    print("\n=== Zoo Manager ===")
    try:
        name = clean_name(input("Enter the zoo's name: "))
        if not name:
            print(f"The zoo's name cannot be empty. Using '{DEFAULT_ZOO_NAME}'.")
            name = DEFAULT_ZOO_NAME
        zoo = Zoo(name, rng=random.Random())
        show_delegation_intro()
        ZooApp(zoo).run()
    except (EOFError, KeyboardInterrupt):
        print("\nGoodbye!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
