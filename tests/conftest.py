import pytest


def _read_outputs(path):
    """Parse a GITHUB_OUTPUT file written with heredoc delimiters."""
    outputs = {}
    lines = path.read_text().splitlines()
    i = 0
    while i < len(lines):
        name, delimiter = lines[i].split("<<", 1)
        value_lines = []
        i += 1
        while lines[i] != delimiter:
            value_lines.append(lines[i])
            i += 1
        outputs[name] = "\n".join(value_lines)
        i += 1
    return outputs


@pytest.fixture
def read_outputs():
    return _read_outputs
