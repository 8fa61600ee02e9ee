# rakusite

A personal homepage that runs in your terminal. It opens on an intro
screen; press any key to reach a list of topics (About, Contact, Cv,
Donate, Quote, Social, Summary, Credits) and read about the selected one
in the "Terminal" panel underneath.

## Installing

```
pip install .
```

## Running

```
rakusite
```

This starts the interactive screen (built on `blessed`). To print a
single screen and exit instead:

```
rakusite --print --scene list --width 100 --height 30
```

`--scene` is `intro` (the default) or `list`; `--width` and `--height`
default to 100 and 30.

### Keys

| Key                  | Action                                  |
|----------------------|-----------------------------------------|
| any key (intro)      | go to the topic list                    |
| `↓` / `s`            | select the next topic                   |
| `↑` / `w`            | select the previous topic               |
| `→` / `d` / `Enter`  | toggle the selected topic's status      |
| `←` / `a`            | clear the selection                     |
| `h` / `e`            | jump to the first / last topic          |
| `Ctrl+O`             | show the selected topic's link          |
| `Esc`                | return to the intro screen              |
| `q`                  | quit (from the topic list)              |

`Ctrl+O` writes the link of the selected topic on the bottom line; topics
without a link (About, Quote, Summary) show nothing.

While the Quote topic is still "todo", a new random quote is drawn each
time its text is shown; once it is marked completed, the last drawn
quote stays on screen.

## Using it as a library

The pieces work without a terminal too:

```python
from rakusite.app import App
from rakusite.topic import Topic, random_quote
from rakusite.status import Status

app = App()
app.on_down()                 # select the first topic
print(app.selected_info())    # text for the selected topic
for line in app.render(80, 24):
    print(line)

print(Topic.CV.link())
print(Status.TODO.symbol(), Status.TODO.toggled())
print(random_quote())
```

`App(opener=...)` takes a callable that `App.open_link()` calls with the
selected topic's URL; `open_link()` also returns that URL, or `None`.

`rakusite.cli` has `State`, which routes keys to the menu or, on the
intro scene, switches to the menu, plus `render_intro(width, height)`
and `render_frame(state, width, height)`, which return the screen as a
list of strings.

`rakusite.fps.FpsRecorder` keeps a rolling frame rate over the last 16
frame timestamps; `init_fps_recorder`, `record_frame` and `current_fps`
manage one recorder per thread.

`rakusite.backend` selects a rendering backend by name:

```python
from rakusite.backend import BackendType, MultiBackendBuilder, parse_backend_from_url

parse_backend_from_url("https://example.com/?backend=dom")   # BackendType.DOM

builder = MultiBackendBuilder.with_fallback(
    BackendType.CANVAS,
    {BackendType.DOM: make_dom, BackendType.CANVAS: make_canvas},
).options(BackendType.CANVAS, {"grid_id": "terminal"})
backend = builder.build("https://example.com/?backend=canvas")
```

The factories are your own callables; each receives the options set for
its backend type (or `None`). `build()` wraps the result in an
`FpsTrackingBackend`, which records a frame after each successful
`flush()` and passes every other attribute through. It raises
`ValueError` when no factory is registered for the chosen type.

`rakusite.footer.render_backend_footer(current_backend, base_url)`
returns an HTML `<div>` naming the active backend, with links
(`?backend=...`) to the other one and a placeholder for the frame rate.

## What it does not do

- It has no web or browser front end and renders no HTML page of its
  own; the backend and footer helpers only choose, wrap and describe
  backend objects that you supply.
- The intro screen is static text: there are no animated transitions.
- The interactive screen records frames but does not display the frame
  rate.
- The links are opened only through an `opener` you pass to `App`; the
  `rakusite` command just shows them.

## Tests

```
pip install .[test]
pytest
```