# questionforge

Tools for building a bank of JLPT-style reading questions (levels N3 and N2).
There are three commands:

1. `questionforge-generate` asks a Gemini model for question sets and saves each reply that is valid JSON.
2. `questionforge-concat` joins every file in a level's output directory into one file.
3. `questionforge-restructure` loads a level's merged JSON into typed question
   records and writes it back in a normalised, pretty-printed form.

All three commands work relative to the current directory. You can pass
`--base-dir DIR` to use another directory.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Directory layout

```
prompts/
    create-question_to_json.md   # main instruction; "**LEVEL**" becomes e.g. "**N3**"
    base-info.md                 # shared background information
    n3/ja-question.md            # level-specific details
    n2/ja-question.md
output/
    questions/
        n3/ ...
        n2/ ...
```

## Generating questions

Set two environment variables first:

- `GOOGLE_GEMINI_API_KEY`: your API key. It is sent in the `x-goog-api-key` header.
- `GEMINI_MODELS`: exactly two model names separated by a comma. Only the first one is used.

```
export GOOGLE_GEMINI_API_KEY=placeholder
export GEMINI_MODELS=model-a,model-b
questionforge-generate
```

Options:

| option | default | meaning |
| --- | --- | --- |
| `--base-dir DIR` | current directory | directory that holds `prompts/` and `output/` |
| `--levels L [L ...]` | `n3 n2` | levels to generate, in order |
| `--count N` | `30` | requests per level |
| `--max-retries N` | `3` | attempts per request before it counts as failed |
| `--retry-wait SECONDS` | `60` | base wait after a failed attempt; the wait is this times the attempt number |
| `--interval SECONDS` | `15` | pause after each request |

For each level the command builds one prompt. The prompt is the three prompt
files joined by blank lines. It then sends `--count` requests, each with a
60-second timeout. Code fences around a reply (`` ```json `` ... `` ``` ``) and
the whitespace around them are removed. A reply that then parses as strict JSON is
saved as `output/questions/<level>/<unix-timestamp>.json`. Two replies saved in
the same second share a file name, so the later one overwrites the earlier one. A reply that is not valid JSON is
logged with its first 100 characters and skipped. The command logs how many
requests succeeded, failed and gave invalid JSON, for each level and for the whole run.

The command exits with status 1 if a prompt file is missing or either
environment variable is unset or malformed.

## Merging files

```
questionforge-concat [--base-dir DIR]
```

For `n3` and then `n2`, every regular file in `output/questions/<level>/` is
read in path order. The contents are joined unchanged into
`output/questions/<level>/concat_all.md`. A level whose directory holds no
files is logged and skipped. A level whose directory is missing stops the run with
status 1. An existing `concat_all.md` is itself a file in the directory, so a
second run includes it in the new output.

## Normalising merged JSON

```
questionforge-restructure [--base-dir DIR]
```

For `n2` and then `n3`, the command reads
`output/questions/<level>/concat_all.json`. It checks the file against the
question schema and writes `concat_with_struct.json` next to it, indented by
two spaces with non-ASCII text kept as is. Missing numeric ids default to
`0`. A missing directory or file is logged and skipped. JSON that does not fit
the schema stops the run with status 1.

## Python API

```python
from questionforge.models import parse_questions, dump_questions
from questionforge.files import read_file

questions = parse_questions(read_file("concat_all.json"))
print(questions[0].level_name, len(questions[0].sub_questions))
print(dump_questions(questions))
```

- `questionforge.models`: the `Question` and `SubQuestion` dataclasses, each with `to_dict()`. It also has
  `parse_questions(text)`, which raises `ValueError` on bad input, and `dump_questions(questions)`.
  A `Question` has `id`, `level_id`, `level_name`, `category_id`,
  `category_name`, `chapter`, `sentence`, `prerequisites` and `sub_questions`.
  A `SubQuestion` has `id`, `hint_id`, `answer_id`, `sentence`,
  `select_answer` (a list of string-to-string mappings) and `answer`. Ids must
  be unsigned 32-bit integers.
- `questionforge.concat.concat_level(level_dir, output_name)` and
  `questionforge.restructure.restructure_level(level_dir, source_name, target_name)`
  do the work of one level. Each returns the written path, or `None` when it skips the level.
- `questionforge.generate`: `replace_level`, `clean_response`,
  `is_valid_json`, `load_settings`, `build_prompt`, `request_gemini` (raises
  `ApiError`), `save_text` and the `LevelStats` counter.
- `questionforge.files`: `walk_dir`, `read_file`, `write_file` and `replace_target`.

## What the package does not do

No command produces `concat_all.json`. `questionforge-concat` joins files as
plain text into `concat_all.md` and does not turn the generated JSON
documents into a single JSON array. Before you run `questionforge-restructure`,
you have to prepare `concat_all.json` yourself.