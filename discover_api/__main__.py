from discover_api.run import main

if __name__ == "__main__":
    main()
