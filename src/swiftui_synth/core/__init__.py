"""Core parsing, synthesis and rendering for swiftui-synth."""
