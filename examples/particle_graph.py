"""Walk through naming the systems of a small particle graph."""

import logging

from graphnames import ContextType, LocalGraph, SystemNamer


def build_graph() -> LocalGraph:
    graph = LocalGraph()
    graph.add_context(ContextType.SPAWNER, label="Burst")
    for title in ["Fire", "Fire", "", "Smoke"]:
        data = graph.add_data(title)
        graph.add_context(ContextType.INIT, data=data)
        graph.add_context(ContextType.UPDATE, data=data)
        graph.add_context(ContextType.OUTPUT, data=data)
    return graph


def print_names(namer: SystemNamer) -> None:
    for handle, name in namer.display_names().items():
        print(f"  {handle}: {name}")


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    graph = build_graph()
    namer = SystemNamer(graph)
    namer.sync()
    print("Initial systems:")
    print_names(namer)

    smoke = namer.systems[-1]
    namer.set_base_name(smoke, "Fire")
    namer.sync()
    print("After renaming Smoke to Fire:")
    print_names(namer)


if __name__ == "__main__":
    main()
