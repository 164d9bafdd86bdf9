import logging

import gradio as gr

from json_table_converter.handlers import (
    convert_handler,
    copy_handler,
    export_handler,
    toggle_pivot_handler,
    upload_handler,
)
from json_table_converter.session import ConverterSession

# --- UI Definition ---
with gr.Blocks(title="JSON Table Converter") as demo:
    gr.Markdown("# JSON Table Converter")
    gr.Markdown("Paste or upload JSON, view it as a flat table, pivot it and export to CSV, Markdown or text.")

    # State
    session_state = gr.State(value=ConverterSession())

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            gr.Markdown("### 1. Input")
            json_input = gr.Textbox(
                label="JSON",
                placeholder='[{"name": "Alice", "age": 30}]',
                lines=14,
                max_lines=40,
            )
            file_input = gr.File(label="Upload JSON File", file_types=[".json"])
            convert_btn = gr.Button("Convert", variant="primary")
            status_msg = gr.Textbox(label="Status", interactive=False)

        # Right Panel: Table & Export
        with gr.Column(scale=2):
            gr.Markdown("### 2. Table")
            pivot_btn = gr.Button("Pivot")
            table_grid = gr.Dataframe(label="Table", interactive=False, wrap=True)

            gr.Markdown("### 3. Export")
            output_format = gr.Radio(choices=["CSV", "Markdown", "Text"], value="CSV", label="Output Format")
            with gr.Row():
                download_btn = gr.Button("Download")
                copy_btn = gr.Button("Copy")
            download_output = gr.File(label="Download Result")
            copy_output = gr.Textbox(label="Copy Output", lines=8, interactive=False, show_copy_button=True)

    convert_outputs = [session_state, table_grid, status_msg, pivot_btn]

    convert_btn.click(fn=convert_handler, inputs=[json_input, session_state], outputs=convert_outputs)

    # Submitting the input box converts, like the button.
    json_input.submit(fn=convert_handler, inputs=[json_input, session_state], outputs=convert_outputs)

    file_input.upload(
        fn=upload_handler,
        inputs=[file_input, session_state],
        outputs=[json_input] + convert_outputs,
    )

    pivot_btn.click(fn=toggle_pivot_handler, inputs=[session_state], outputs=convert_outputs)

    download_btn.click(
        fn=export_handler,
        inputs=[session_state, output_format],
        outputs=[download_output, status_msg],
    )

    copy_btn.click(
        fn=copy_handler,
        inputs=[session_state, output_format],
        outputs=[copy_output, status_msg],
    )

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    demo.launch()
