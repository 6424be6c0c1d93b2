"""Group assignment search demo."""

from grouprounds.assignment import AssignmentConfig, AssignmentSolver
from grouprounds.assignment.summary import summarize_assignments
from grouprounds.elements import ConflictMatrix
from grouprounds.logger import ga_logger
from grouprounds.logger.debug import write_debug_output


def main():
    # Define variables for testing
    n = 4
    labels = {i: name for i, name in enumerate("ABCD")}

    ga_logger.setup_console_logging()

    config = AssignmentConfig(
        min_group_size=2,
        canonicalize=True,
        timeout_seconds=60.0,
        verify_results=True,
    )
    solver = AssignmentSolver(ConflictMatrix.empty(n), config=config)
    sequences = solver.solve()
    summarize_assignments(sequences, labels=labels, limit=3)

    output = write_debug_output(ga_logger, "./output/assignments.html")

    print(f"Number of items: {n}")
    print(f"Maximum rounds: {solver.best_length}")
    print(f"Distinct schedules: {len(sequences)}")
    print(f"Debug log written to {output}")


if __name__ == "__main__":
    main()
