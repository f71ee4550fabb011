"""
Entry point for running the CLI as a module: `python -m cli`

Examples:
  python -m cli lookup ntpserver environment=production
  python -m cli -c hiera.yaml datasources environment=production
  python -m cli interpolate "/etc/%{role}" role=web
"""

from cli import main

if __name__ == "__main__":
    main()
