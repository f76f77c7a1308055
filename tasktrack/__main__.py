from tasktrack.cli import cli

def main():
    """Main entry point for tasktrack."""
    cli()

if __name__ == '__main__':
    main()
