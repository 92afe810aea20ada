from typing import Any, List, Union


def _render(value: Any) -> str:
    """Render a body value for the prompt; missing values become empty strings."""
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value)
    return str(value)


def generate_interview_questions_prompt(
    role: Any,
    level: Any,
    techstack: Union[str, List[str], None],
    interview_type: Any,
    amount: Any,
) -> str:
    """
    Generate the prompt for voice-interview question generation.

    The questions are read aloud by a voice assistant, so the model is told to
    avoid characters such as "/" and "*".

    Args:
        role: The job role.
        level: The job experience level.
        techstack: The tech stack, either a comma separated string or a list.
        interview_type: Behavioural vs technical weighting.
        amount: The number of questions requested.

    Returns:
        The formatted prompt string.
    """
    return (
        "Prepare questions for a job interview.\n"
        f"The job role is {_render(role)}.\n"
        f"The job experience level is {_render(level)}.\n"
        f"The tech stack used in the job is: {_render(techstack)}.\n"
        f"The focus between behavioural and technical questions should lean towards: {_render(interview_type)}.\n"
        f"The amount of questions required is: {_render(amount)}.\n"
        "Please return only the questions, without any additional text.\n"
        "The questions are going to be read by a voice assistant so do not use \"/\" or \"*\" "
        "or any other special characters which might break the voice assistant.\n"
        "Return the questions formatted like this:\n"
        "[\"Question 1\", \"Question 2\", \"Question 3\"]"
    )
