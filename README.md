# postmangen

`postmangen` reads the source tree of a Go HTTP service and writes a
Postman collection (schema v2.1.0) describing its routes, with example
JSON request bodies built from the service's struct declarations.

## What it looks at

`postmangen.folders.get_folders(path)` lists the subdirectories directly
under `path` (skipping names that contain a dot) together with the files
directly inside each of them, and then `path` itself with its own files.
Deeper directories are not scanned.

Two routing styles are understood.

* **`router.HandleFunc` style** (`postmangen.routes.get_routes`) – every
  line containing `router.HandleFunc("/path", package.Handler).Methods("POST")`
  becomes a route. `group_routes` puts routes into folders by the first
  segment of their path; a route with a single segment gets a folder of its
  own. For `POST`, `PUT` and `DELETE` routes, `postmangen.rawbody.attach_raw_body`
  finds the handler (a function whose line holds
  `w http.ResponseWriter, r *http.Request`) in the catalog named by the
  handler's package, takes the variable passed to
  `json.NewDecoder(r.Body).Decode(...)`, traces it to the `:=` line that
  declares it, and uses the sample body of the struct it names.
* **chi style** (`postmangen.routes.get_routes_chi`) – each block starting
  at a line with `r.Route("/group", ...)` and ending at the next `})`
  becomes a folder, and each `r.Get("/...")`, `r.Post("/...")` and so on
  inside it becomes a route. `attach_raw_body_chi` gives `POST` and `PUT`
  routes the sample body of the struct named like the folder, or of the
  struct named `Filter` when the path contains `get-list`; all other routes
  get an empty body.

`postmangen.structures.get_structs` reads every `.go` file, finds its
struct declarations, and `json_structure` renders each as a sample JSON
body. Field values follow the type: integers `0`, floats `0.1`, strings
`"text"`, booleans `false`, `time.Time` the fixed timestamp
`"2022-03-14T05:40:00.000Z"`. Keys come from `json:"..."` tags; fields
tagged `json:"id"` and fields of unrecognised type are left out.

## Output

`postmangen.postman.build_collection(groups, host, port, name)` returns the
collection as plain Python data; `generate_postman(path, groups, host, port,
name)` writes it to `<path>/<name>.json` and returns its folders. The
collection defines one variable, `base`, set to `<host>:<port>`. Every
request uses `{{base}}` as its host and carries one saved `200 OK` example
response.

## Command line

Installing the package provides the `postmangen` command:

```
postmangen URL PORT PATH NAME [--chi]
```

* `URL` – base URL of the service
* `PORT` – its port
* `PATH` – root directory of the sources; the collection is written here
* `NAME` – collection name, also the output file name
* `--chi` – read `r.Route` blocks instead of `router.HandleFunc` lines

On a file error or a source line it cannot make sense of, the command
prints the reason to standard error and exits with status 1.

## From Python

```python
from postmangen.generator import start_generate

# router.HandleFunc style routes
start_generate("http://localhost", "8080", "./myservice", "MyService", False)

# chi style routes
start_generate("http://localhost", "8080", "./myservice", "MyService", True)
```

The individual steps are available as well:

```python
from postmangen.folders import get_folders
from postmangen.routes import get_routes, group_routes
from postmangen.structures import get_structs
from postmangen.rawbody import attach_raw_body
from postmangen.postman import build_collection

catalogs = get_folders("./myservice")
groups = group_routes(get_routes(catalogs))
groups = attach_raw_body(groups, get_structs(catalogs), catalogs)
collection = build_collection(groups, "http://localhost", "8080", "MyService")
```

## Limits

The scanners work line by line on text patterns; they do not parse the
language. Routes or structs written in other shapes than those above, or
spread over lines differently, are missed or misread. Request headers and
real responses are not generated.

## Running the tests

```
pip install -e ".[test]"
pytest
```