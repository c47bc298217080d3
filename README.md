# resourcebook

A small interactive console for keeping a list of resources. Each resource has
a name, a link and a type. The list is stored in a semicolon-separated file,
`misDatos.csv` in the current directory unless another path is given. Each line
holds one resource and every field ends with `;`:

```
python;docs.python.org;manual;
sqlite;sqlite.org;reference;
```

When reading, empty fields are dropped and only the first three fields of a
line are used; missing fields become empty strings. When writing, each field
together with its `;` is cut to 199 characters.

## Installation

```
pip install .
```

## Usage

```
resourcebook [DATABASE]
```

`DATABASE` is the record file to use (default: `misDatos.csv`). If the file
exists, its records are loaded at start-up; an empty file is reported as a
parse error.

The menu prompts are in Spanish and offer these options:

1. Look up a resource by name. If no resource has that name, you are asked
   `[s/n]`; an answer starting with `s` goes on to insert a new resource.
2. Insert a resource: name, link and type. Names are not checked for
   duplicates.
3. Delete the first resource with a given name. An unknown name is reported as
   an error and the menu continues.
4. Show every resource.
5. Exit without saving.
6. Save to the record file and exit. If the file cannot be written, an error
   is shown and the menu continues.

Input is read as whitespace-separated words, so every value is a single word.
An unknown menu choice prints `INPUT desconocido` and the menu is shown again.
The program also ends when input runs out.

## Library use

```python
from resourcebook.datamanager import Resource, ResourceDatabase

db = ResourceDatabase("misDatos.csv")
if db.exists():
    db.load()                      # appends the file's records, returns the count
db.add(Resource("python", "docs.python.org", "manual"))
print("python" in db, len(db), db.find("python"))
db.delete("python")                # raises ResourceNotFoundError if absent
db.save()                          # raises DatabaseSaveError on failure
```

`resourcebook.console` holds `Console`, which drives a `ResourceDatabase` from
any text streams, the `Option` enum of menu choices, and `main`.
`resourcebook.interface` prints the fixed menu texts.
`resourcebook.csvparser` holds the low-level reader and writer:
`parse_line`, `parse_csv_file`, `format_row` and `write_csv_file`, which raises
`CsvWriteError`.

## Limitations

- When the record file does not exist, option 1 only prints a question about
  creating it; nothing is created and no answer is read. Saving (option 6)
  does create the file.
- Saving an empty list truncates the file and is then reported as a save
  error.
- Fields cannot contain `;` or whitespace.

## Development

```
pip install -e ".[test]"
pytest
```