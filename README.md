# datagen-client

A small client for a test-data generation service. You describe a table
(its name, how many rows you want, and its fields), send the description to
the service as JSON, and save the CSV it returns.

The package has no runtime dependencies beyond the standard library.

## Installing

```
pip install .
```

## Running

```
datagen-client
```

Options:

- `--url URL` – the service endpoint (default `http://localhost:8080/generate`)
- `--timeout SECONDS` – socket timeout for the request (default: none)

The client reads commands line by line from standard input and starts with
these settings:

- table name `users`
- 10 rows
- output file `output.csv`
- no fields

### Commands

```
table NAME             set the table name
rows N                 set the number of rows
output PATH            set the suggested output file
add                    add a field
remove N               remove field in row N
name N NAME            set the name of field N
type N TYPE            set the type of field N (int, double, string, name)
param N KEY VALUE      set a parameter of field N
show                   print the request body
send                   send the request
cancel                 cancel the running request
wait                   wait for the running request to finish
help                   show the command list
quit                   leave (exit and end of input work too)
```

Rows are numbered from 1. Arguments are split like shell words, so a value
with spaces can be quoted.

A new field has type `int` and no name. Each type has its own parameters:

| Type     | Parameters                              | Allowed range          |
|----------|-----------------------------------------|------------------------|
| `int`    | `min` (default 1), `max` (default 100)  | -1000000 to 1000000    |
| `double` | `min` (default 1), `max` (default 100)  | -1000000 to 1000000    |
| `string` | `length` (default 10)                   | 1 to 1000              |
| `name`   | none                                    |                        |

When you change a field's type, its parameters go back to the defaults for the
new type. Setting it to the type it already has changes nothing. `param` only
accepts keys the field's type has. Values outside the allowed range, and a row
count outside 1 to 10000, are clamped when the body is built.

### Sending

`send` checks the input first and reports the first problem as a warning:

- `Table name cannot be empty.`
- `At least one field is required.`
- `Field name in row N cannot be empty.`

If the input is valid, the body is posted to the endpoint with
`Content-Type: application/json` on a background thread, and the prompt
returns. Replies are handled before the next prompt, or right away with
`wait`. Only one request runs at a time.

When the service returns data, you are asked where to save it:

```
Save CSV File [output.csv] (CSV Files (*.csv)):
```

An empty line accepts the suggested name; end of input skips saving.
Messages are printed as `[warning]`, `[critical]` or `[information]` lines,
for example `[critical] Network Error: ...` when the request fails (an HTTP
status of 400 or more counts as a failure) or `[critical] File Error: ...`
when the file cannot be written. `cancel` aborts the request and prints
`[information] Cancelled: Request has been cancelled.`

## Request body

```json
{
    "table_name": "users",
    "rows": 10,
    "output_file": "users.csv",
    "fields": [
        {"name": "id", "type": "int", "params": {"min": "1", "max": "1000"}},
        {"name": "name", "type": "string", "params": {"length": "10"}}
    ]
}
```

Parameter values are sent as strings. Fields of type `name` carry no `params`
key.

## Using it as a library

- `datagen_client.fields` describes a request: `FieldType`, `Field`,
  `GenerationRequest`, `ValidationError` and `default_params()`.
  `GenerationRequest.validate()` raises `ValidationError` with the messages
  above; `GenerationRequest.to_json()` and `Field.to_json()` build the body;
  `Field.set_type()` changes a field's type.
- `datagen_client.network` provides `NetworkWorker`, which posts one request
  at a time on a background thread and calls `on_data`, `on_error` and
  `on_finished` from that thread. It has `process_request(url, data,
  headers)`, `cancel_request()` and `close()`, and works as a context manager.
  A new request drops any earlier one; a cancelled request finishes without
  an error.
- `datagen_client.controller` provides `ClientController`, which holds the
  form state: `add_field()`, `remove_field()`, `set_field_type()`,
  `create_json_body()`, `send_request()`, `cancel_request()` and the
  `on_data_received()`, `on_request_finished()` and `on_error_occurred()`
  handlers. Override `get_save_file_name`, `show_warning`, `show_critical`
  and `show_information` to supply your own dialogs; by default the suggested
  file name is used and messages are collected in `messages`.
- `datagen_client.app` provides `ClientWindow`, the console front end, with
  `run()`, and `main()`, the entry point of the `datagen-client` command.

## What it does not do

There is no graphical window: the client is driven by typed commands only.
It does not generate data itself; it needs a running generation service at
the configured URL.

## Running the tests

```
pip install ".[test]"
pytest
```